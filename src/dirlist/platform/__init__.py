"""Platform adapters: OS filesystem access and logging."""
