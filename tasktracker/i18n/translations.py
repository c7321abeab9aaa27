# -*- coding: utf-8 -*-
"""
Translation dictionaries for German and English.

This module contains all translatable strings for the Task Tracker.
Relative time labels use separate singular/plural keys because German
does not pluralize by appending "s".
"""

TRANSLATIONS = {
    "en": {
        # Relative time labels
        "time.today": "today",
        "time.tomorrow": "Tomorrow",
        "time.yesterday": "Yesterday",
        "time.overdue": "overdue",
        "time.in_days": "in {n} days",
        "time.days_ago": "{n} days ago",
        "time.in_hour": "in {n} hour",
        "time.in_hours": "in {n} hours",
        "time.hour_ago": "{n} hour ago",
        "time.hours_ago": "{n} hours ago",
        "time.in_year": "in {n} year",
        "time.in_years": "in {n} years",
        "time.year_ago": "{n} year ago",
        "time.years_ago": "{n} years ago",

        # Categories
        "category.work": "Work",
        "category.personal": "Personal",
        "category.exercise": "Exercise",
        "category.other": "Other",

        # Due date presets
        "due.tomorrow": "Tomorrow",
        "due.3_days": "3 Days",
        "due.1_week": "1 Week",
        "due.2_weeks": "2 Weeks",

        # Summary
        "summary.title": "My Tasks",
        "summary.completed_of": "{completed} of {total} completed",
        "summary.no_tasks": "No tasks yet",
        "summary.no_goals": "No goals yet",
        "summary.goals": "Goals",
        "summary.dark_mode": "Dark mode",
        "stats.total": "Total",
        "stats.completed": "Completed",
        "stats.overdue": "Overdue",
        "stats.today": "Today",

        # Overdue alert
        "alert.title": "Task Overdue!",
        "alert.message": "\"{text}\" is overdue",
        "on": "on",
        "off": "off",
    },
    "de": {
        # Relative time labels
        "time.today": "heute",
        "time.tomorrow": "Morgen",
        "time.yesterday": "Gestern",
        "time.overdue": "überfällig",
        "time.in_days": "in {n} Tagen",
        "time.days_ago": "vor {n} Tagen",
        "time.in_hour": "in {n} Stunde",
        "time.in_hours": "in {n} Stunden",
        "time.hour_ago": "vor {n} Stunde",
        "time.hours_ago": "vor {n} Stunden",
        "time.in_year": "in {n} Jahr",
        "time.in_years": "in {n} Jahren",
        "time.year_ago": "vor {n} Jahr",
        "time.years_ago": "vor {n} Jahren",

        # Categories
        "category.work": "Arbeit",
        "category.personal": "Privat",
        "category.exercise": "Sport",
        "category.other": "Sonstiges",

        # Due date presets
        "due.tomorrow": "Morgen",
        "due.3_days": "3 Tage",
        "due.1_week": "1 Woche",
        "due.2_weeks": "2 Wochen",

        # Summary
        "summary.title": "Meine Aufgaben",
        "summary.completed_of": "{completed} von {total} erledigt",
        "summary.no_tasks": "Noch keine Aufgaben",
        "summary.no_goals": "Noch keine Ziele",
        "summary.goals": "Ziele",
        "summary.dark_mode": "Dunkelmodus",
        "stats.total": "Gesamt",
        "stats.completed": "Erledigt",
        "stats.overdue": "Überfällig",
        "stats.today": "Heute",

        # Overdue alert
        "alert.title": "Aufgabe überfällig!",
        "alert.message": "\"{text}\" ist überfällig",
        "on": "an",
        "off": "aus",
    }
}
