"""
Catalog Service application package
"""
