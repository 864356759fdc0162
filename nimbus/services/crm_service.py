"""CRM Service - Static lead board.

Interface Contract:
- board(query=None) -> list of columns, one per LeadStatus in order
- Leads are mock data fixed at process start
"""

from __future__ import annotations

from typing import Any

from nimbus.models import Lead, LeadStatus


MOCK_LEADS = [
    Lead("1", "Alice Chen", "TechFlow", LeadStatus.NEW, "Architecture AI", 45),
    Lead("2", "Markus V", "BuildRight", LeadStatus.CONTACTED, "Architecture AI", 60),
    Lead("3", "Sarah Jones", "DesignHub", LeadStatus.QUALIFIED, "LegalTech AI", 85),
    Lead("4", "David Lee", "LawScale", LeadStatus.CLOSED, "LegalTech AI", 95),
    Lead("5", "Elena R", "MedAssist", LeadStatus.NEW, "Health AI", 50),
]


class CRMService:
    """Groups the mock leads into kanban columns."""

    def __init__(self, leads: list[Lead] | None = None):
        self.leads = list(MOCK_LEADS if leads is None else leads)

    def board(self, query: str | None = None) -> list[dict[str, Any]]:
        """Build board columns, optionally filtered by a name/company/vertical substring."""
        needle = (query or "").strip().lower()
        leads = self.leads
        if needle:
            leads = [
                lead for lead in leads
                if needle in lead.name.lower()
                or needle in lead.company.lower()
                or needle in lead.vertical.lower()
            ]

        return [
            {
                "status": status.value,
                "count": sum(1 for lead in leads if lead.status is status),
                "leads": [lead.to_dict() for lead in leads if lead.status is status],
            }
            for status in LeadStatus
        ]
