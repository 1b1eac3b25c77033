"""Creational and structural design pattern demonstrations."""
