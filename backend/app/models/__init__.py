# Domain records held by the in-memory application store; import from the submodules.
