"""Reflex user interface: states, components, pages and theme."""
