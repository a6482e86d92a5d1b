"""Command-line front end for postchunks."""
