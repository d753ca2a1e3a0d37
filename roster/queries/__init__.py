"""Dynamic member/team queries.

``predicates`` turns a search condition into a filter expression and
``member_search`` runs it as a flat or paginated projection.
"""
