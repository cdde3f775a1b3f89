"""Cricket Darts match tracker"""
