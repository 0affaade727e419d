"""
Core cross-cutting pieces shared by the facade, adapter and connection.
"""
