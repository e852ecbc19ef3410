"""Field expansion engine.

Turns a single cron field expression (`*`, `5`, `1-5`, `1,15`, `*/15`) into
the explicit ascending list of values it matches.
"""
