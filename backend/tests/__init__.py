"""
Test Suite

Unit and API tests for the SkillMatch application.
"""
