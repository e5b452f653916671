"""Command line front-end for the Duphlux client."""
