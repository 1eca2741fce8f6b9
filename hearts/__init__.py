"""
Hearts for the terminal: a 4-seat engine with human and automated players.
"""
