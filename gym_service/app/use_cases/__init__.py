"""
Use Cases

Organized into domain folders:
- auth/: Registration, login and email verification
- users/: Member profile
- memberships/: Plans, subscriptions, dashboard and lifecycle sweep
- attendance/: Check-in and check-out
- health/: Health metrics and tips
- notifications/: In-app notification inbox
- engagement/: Reminder evaluation and de-duplicated delivery
- admin/: Reports, plan and user management

Import from subdirectories.
"""
