"""
Graphical interface module for Ping Pong
"""
