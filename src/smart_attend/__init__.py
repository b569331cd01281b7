"""SmartAttend package.

Feature modules (users, sessions, attendance, notifications, analytics) each
keep a thin Flask controller on top of service and repository layers. All
state lives in an explicit ``AppStore`` built per application instance.
"""
