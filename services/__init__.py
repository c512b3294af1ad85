"""Services module for Word Scramble Bot."""
