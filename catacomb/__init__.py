"""Maze generation and breadth-first distance queries for dungeon levels."""
