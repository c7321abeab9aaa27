"""Task Tracker - personal tasks, goals and relative due dates"""
