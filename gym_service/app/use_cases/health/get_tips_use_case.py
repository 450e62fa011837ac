"""
Get Tips Use Case

Rule-based training and nutrition tips.
"""

from typing import List, Optional
from uuid import UUID

from gym_service.app.services.clock import Clock
from gym_service.app.services.unit_of_work import UnitOfWork
from gym_service.app.use_cases.engagement import ATTENDANCE_THRESHOLD, attendance_window
from gym_service.domain.entities import HealthMetric
from gym_service.libs.result import Result, Return
from .dtos import TipsResponse

HIGH_HEART_RATE_BPM = 100
HIGH_CALORIE_INTAKE = 2800


def build_tips(latest: Optional[HealthMetric], weekly_checkins: int) -> List[str]:
    tips = []

    if latest is not None and latest.bmi:
        if latest.bmi >= 30:
            tips.append("Aim for 150-300 minutes of moderate cardio weekly and prioritize whole foods.")
        elif latest.bmi >= 25:
            tips.append("Try 3x/week strength + 2x/week cardio with a small calorie deficit (200-300/day).")
        elif latest.bmi < 18.5:
            tips.append("Increase protein and healthy carbs; focus on progressive overload 3-4x/week.")
        else:
            tips.append("Great BMI range. Maintain with balanced training and adequate protein intake.")
    else:
        tips.append("Add height and weight to calculate BMI for better recommendations.")

    if weekly_checkins < ATTENDANCE_THRESHOLD:
        tips.append("Your attendance is low. Try scheduling sessions or going with a buddy.")
    else:
        tips.append("Nice consistency! Keep at least 3 sessions per week for steady progress.")

    if latest is not None and latest.heart_rate_bpm and latest.heart_rate_bpm > HIGH_HEART_RATE_BPM:
        tips.append(
            "Resting heart rate seems high. More low-intensity cardio and better sleep may help. "
            "If persistent, consult a doctor."
        )

    if latest is not None and latest.calories_intake and latest.calories_intake > HIGH_CALORIE_INTAKE:
        tips.append("High intake today. Add a walk or swap sugary drinks for water.")

    return tips


class GetTipsUseCase:
    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(self, user_id: UUID) -> Result[TipsResponse]:
        since, until = attendance_window(self.clock.today())

        async with self.uow:
            latest = await self.uow.health_metrics.get_latest_for_user(user_id)
            weekly = await self.uow.attendance.count_for_user_between(user_id, since, until)

            return Return.ok(
                TipsResponse(
                    tips=build_tips(latest, weekly),
                    weekly_checkins=weekly,
                    bmi=latest.bmi if latest else None,
                )
            )
