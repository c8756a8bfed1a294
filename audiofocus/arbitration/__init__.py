"""Arbitration state, start decisions, ownership changes, debouncing, suppression and loop guards."""