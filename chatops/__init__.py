"""
Chat incident triage: core configuration and the triage domain.
"""
