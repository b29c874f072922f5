"""Shared configuration, constants, errors and logging."""
