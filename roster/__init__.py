"""Member/team search package: models, dynamic filters and paginated queries.

``roster.queries`` composes optional search conditions into one filter and
runs it as a flat or paginated projection over Member LEFT JOIN Team.
"""
