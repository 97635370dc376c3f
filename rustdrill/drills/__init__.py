"""Solved exercises written in Python, one module per topic."""