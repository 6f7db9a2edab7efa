"""
Placement tracking, drag interaction and scoring for the training exercise.

``placement``, ``interaction``, ``session`` and ``client`` are plain Python and
do not need Django configured; ``validation.validate_placements`` reads the
answer key from the database.
"""
