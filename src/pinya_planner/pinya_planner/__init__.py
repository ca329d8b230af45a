"""Pinya Planner package.

Formation layout & assignment engine for a castells troupe, organized by
feature modules (members, formation, assignment, layouts, publication, ...)
with a thin Flask controller layer over service/repository layers.
"""
