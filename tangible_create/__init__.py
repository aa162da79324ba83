"""create-tangible-plugin -- scaffold a new Tangible WordPress plugin.

Copies the bundled plugin template into a fresh directory, renders the
placeholder-bearing files with the project metadata, renames the plugin
entry file after the project, and installs dependencies.
"""

__version__ = "0.3.0"
