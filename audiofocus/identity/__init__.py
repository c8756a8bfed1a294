"""Stable identities for media sources across audio and media sessions."""