"""Discipleship pairing service.

Leaders and learners are paired through invite codes and work through a
six-week curriculum together; this package holds the API, the domain rules
and their persistence.
"""
