"""Kernel – errors and security value types shared by every adapter."""
