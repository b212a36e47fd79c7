"""
Reusable widget components (menu, dialog, data table, sidenav).

Components are composed into page objects and bound to a root selector,
so the same widget wrapper works wherever the widget is rendered.
"""
