"""
Place Value Showdown.

A place-value card game: a student and an AI opponent arrange dealt digit
cards into slots and the better number wins the round.
"""
