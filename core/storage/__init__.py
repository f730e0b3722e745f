"""
Daily log-file lifecycle: provisioning, naming, appending, listing,
path validation and deletion.
"""
