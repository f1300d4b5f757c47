"""Core assessment utilities.

Responsibilities:
  - Provide the classifier, assembler and record rendering for one player.
  - Must not fetch game data or persist records; consumes a prepared Observation.
"""
