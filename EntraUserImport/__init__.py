# Entra User Import Tool
# Last Update: October 17, 2026

version = "0.3"
