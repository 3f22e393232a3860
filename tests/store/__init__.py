"""Tests for the restaurant store, run directly against the database without the api."""
