"""Tests for core configuration, logging and database wiring."""
