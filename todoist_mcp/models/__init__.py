"""Todoist resource records and request shapes."""
