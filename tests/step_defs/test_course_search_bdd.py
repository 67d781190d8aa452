"""
BDD scenarios for course search and autocomplete (pytest-bdd).
"""

from pytest_bdd import scenarios

scenarios("../features/course_search.feature")
