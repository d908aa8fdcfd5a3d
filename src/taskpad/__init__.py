"""Taskpad - personal task management with Inbox, Today, Upcoming and project views."""

__version__ = "0.1.0"
