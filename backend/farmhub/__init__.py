"""FarmHub - farm management backend"""
