"""
Runtime package: graph traversal and the one-shot run driver.
"""
