"""Hooks that run the property loader from a host application's lifecycle."""

from simpleconf.lifecycle.listener import ApplicationPropertiesListener

__all__ = ["ApplicationPropertiesListener"]
