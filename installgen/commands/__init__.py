"""installgen CLI commands"""
