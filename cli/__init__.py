"""Command-line interface for the study tracker."""
