"""Authentication: registration, login and bearer-token dependencies"""
