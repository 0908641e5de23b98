"""Duke - a command-line task tracker."""
