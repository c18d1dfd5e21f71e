"""
UI Module - Console loop and Textual terminal UI
================================================
"""
