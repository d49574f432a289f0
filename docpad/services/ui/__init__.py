"""Qt user interface: ports, adapters, presenters and the main window."""
