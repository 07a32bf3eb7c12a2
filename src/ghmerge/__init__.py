"""ghmerge: open GitHub pull requests from the current branch."""
