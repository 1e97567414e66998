"""Streamlit host for Place Value Showdown."""
