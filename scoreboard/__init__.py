"""ICPC contest scoreboard with freeze and scroll support"""
