"""Service layer — file and CLI facing operations over the domain."""
