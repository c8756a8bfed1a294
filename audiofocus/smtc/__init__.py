"""Namespace for transport control of system media sessions; it holds no modules yet."""