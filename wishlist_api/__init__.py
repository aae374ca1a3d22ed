"""Wishlist API: per-user folders of saved catalog items"""
