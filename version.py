"""
version.py — PassField
=======================
Single source of truth for the application name and version.
Used by the window title, the user data directory and packaging.
"""

APP_NAME = "PassField"
VERSION  = "1.0.0"
BUILD    = "2026.10.19"
