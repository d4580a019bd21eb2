from smartmenu.server.app import create_server
from smartmenu.server.tools import TOOLS, register_tools

__all__ = ["TOOLS", "create_server", "register_tools"]
