"""Planning math: split selection, focus rotation, scheduling, progression."""
