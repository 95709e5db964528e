"""
LeaveDesk: an MCP tool server for leave management.
"""
