"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt).
It deals with trip points, their catalogues, filtering and sorting.
"""
