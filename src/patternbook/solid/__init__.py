"""SOLID principle demonstrations, each shown before and after, plus DRY."""
