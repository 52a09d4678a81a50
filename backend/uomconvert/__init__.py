"""Unit of measurement conversion service"""
