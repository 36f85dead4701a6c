"""
WebSocket Package

Socket.IO event handlers and the renderer that talks back to the browser.
"""

from .handlers import register_websocket_handlers
from .renderer import SocketIORenderer

__all__ = ['register_websocket_handlers', 'SocketIORenderer']
