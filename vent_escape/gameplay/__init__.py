"""
Simulation core for Vent Escape.
NO UI DEPENDENCIES - everything here runs headless.
"""
