"""Host option store and typed views over it."""
