"""
Collaborators around the game engine: canvas rendering and the pygame host loop.
"""
