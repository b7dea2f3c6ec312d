"""
ai package – Enemy pursuit and run analysis.

Modules:
    pursuit            – Direct pursuit step toward the player
    stats              – Per-run statistics and trend graph
    simulation_runner  – Headless scripted runs (python main.py --simulate N)
"""
