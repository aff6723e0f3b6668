"""Refdesk - A research reference desktop application."""
