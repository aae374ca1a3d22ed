"""Checkout endpoints"""
