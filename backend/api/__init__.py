"""
SDI Designer HTTP routers.
"""
