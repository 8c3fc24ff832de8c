"""Core collaborators for verb dispatch: env, chroot probe, privileges, logging."""
