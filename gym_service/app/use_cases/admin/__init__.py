"""
Admin Use Cases

Reporting, plan management and user management for administrators.
"""

from .get_admin_dashboard_use_case import GetAdminDashboardUseCase
from .reports_use_case import (
    ListActiveMembershipsUseCase,
    ListExpiringMembershipsUseCase,
    ListTodayCheckinsUseCase,
)
from .export_attendance_use_case import ExportAttendanceUseCase, render_attendance_csv
from .manage_plans_use_case import CreatePlanUseCase, DeletePlanUseCase, UpdatePlanUseCase
from .manage_users_use_case import ListUsersUseCase, SetUserActiveUseCase
from .seed_admin_use_case import SeedAdminUseCase
from .dtos import (
    AdminDashboardResponse,
    AdminStats,
    AttendanceExport,
    CheckinReportResponse,
    DeletePlanResponse,
    MembershipReportResponse,
    PlanCommand,
    UpcomingExpiry,
    UserListResponse,
    UserStatusResponse,
    UserSummary,
)

__all__ = [
    # Use Cases
    "GetAdminDashboardUseCase",
    "ListActiveMembershipsUseCase",
    "ListExpiringMembershipsUseCase",
    "ListTodayCheckinsUseCase",
    "ExportAttendanceUseCase",
    "CreatePlanUseCase",
    "UpdatePlanUseCase",
    "DeletePlanUseCase",
    "ListUsersUseCase",
    "SetUserActiveUseCase",
    "SeedAdminUseCase",
    "render_attendance_csv",
    # DTOs
    "AdminDashboardResponse",
    "AdminStats",
    "AttendanceExport",
    "CheckinReportResponse",
    "DeletePlanResponse",
    "MembershipReportResponse",
    "PlanCommand",
    "UpcomingExpiry",
    "UserListResponse",
    "UserStatusResponse",
    "UserSummary",
]
