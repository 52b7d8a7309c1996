"""Sentiment comment desk: in-memory user and comment stores with console and web front ends."""
