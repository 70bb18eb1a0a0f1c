"""Test suite for the student DTO service."""
