"""Foundational pieces shared by the rest of dockdemo: configuration and the log id sequence."""
