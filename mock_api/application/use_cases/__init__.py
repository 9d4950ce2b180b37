"""Use cases that read and mutate users and roles."""
