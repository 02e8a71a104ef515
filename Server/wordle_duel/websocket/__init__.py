"""
WebSocket Package

Socket.IO handlers that push room state to players.
"""
