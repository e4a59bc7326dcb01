"""Bundled demo catalog used when the backend is empty or unreachable."""

from __future__ import annotations

from fetshub.models.base import now_millis
from fetshub.models.project import ItemType, Project, ProjectStatus
from fetshub.models.repo import Commit, RepoState, RepoStatus, short_hash
from fetshub.models.user import User, UserRole

_COMMIT_MESSAGES = (
    "Initial commit",
    "Update README.md",
    "Fix bug in login flow",
    "Refactor dashboard components",
    "Add unit tests",
    "Update dependencies",
    "Optimize build script",
    "Feature: Dark mode",
    "Fix typo in SOP",
    "Deploy to production",
)
_COMMIT_AUTHORS = ("Dev Team", "Admin", "System")
_DAY_MS = 86_400_000


def mock_commits(count: int) -> list[Commit]:
    """Newest-first history spaced one day apart."""
    stamp = now_millis()
    return [
        Commit(
            id=f"cmt-{stamp}-{index}",
            hash=short_hash(),
            message=_COMMIT_MESSAGES[index % len(_COMMIT_MESSAGES)],
            author=_COMMIT_AUTHORS[index % len(_COMMIT_AUTHORS)],
            date=stamp - index * _DAY_MS,
        )
        for index in range(count)
    ]


def _repo(
    remote_url: str,
    *,
    branch: str = "main",
    commits: int,
    synced_ago_ms: int,
    pending: int = 0,
) -> RepoState:
    return RepoState(
        remote_url=remote_url,
        branch=branch,
        commits=mock_commits(commits),
        last_sync=now_millis() - synced_ago_ms,
        status=RepoStatus.AHEAD if pending else RepoStatus.CLEAN,
        pending_changes=pending or None,
    )


def _image(photo: str) -> str:
    return f"https://images.unsplash.com/{photo}?auto=format&fit=crop&w=1600&q=80"


def initial_projects() -> list[Project]:
    """Fresh copy of the demo catalog."""
    now = now_millis()
    return [
        Project(
            id="fets-space",
            name="FETS SPACE",
            description=(
                "Centralized command center for Forun Educational & Testing Services. "
                "Manage exam schedules, client resources, and developer tools."
            ),
            status=ProjectStatus.COMPLETED,
            website_url="https://fets.hub",
            repo_url="https://github.com/forun/fets-space",
            image_url=_image("photo-1497215728101-856f4ea42174"),
            tech_stack=["React", "Vite", "Tailwind CSS"],
            files="src/\n  components/\n    Dashboard.tsx\n    ResourceView.tsx",
            created_at=now,
            git_state=_repo(
                "https://github.com/forun/fets-space.git", commits=5, synced_ago_ms=0
            ),
        ),
        Project(
            id="fets-live",
            name="fets.live",
            description=(
                "Real-time proctoring and educational streaming platform. Delivers secure, "
                "low-latency video feeds for remote exam monitoring."
            ),
            status=ProjectStatus.IN_PROGRESS,
            website_url="https://fets.live",
            repo_url="https://github.com/forun/fets-live",
            image_url=_image("photo-1531482615713-2afd69097998"),
            tech_stack=["WebRTC", "Node.js", "Socket.io"],
            files="server/\n  signaling.ts\nclient/\n  ProctorView.tsx",
            created_at=now - 1_000_000,
            git_state=_repo(
                "https://github.com/forun/fets-live.git",
                branch="dev",
                commits=3,
                synced_ago_ms=3_600_000,
                pending=2,
            ),
        ),
        Project(
            id="fets-team",
            name="fets.team",
            description=(
                "Internal collaboration and HR portal for Forun staff, proctors, and "
                "administrators. Manage shifts, payroll, and compliance."
            ),
            status=ProjectStatus.COMPLETED,
            website_url="https://fets.team",
            image_url=_image("photo-1600880292203-757bb62b4baf"),
            tech_stack=["Next.js", "PostgreSQL", "Prisma"],
            files="pages/\n  roster.tsx\n  payroll.tsx",
            created_at=now - 2_000_000,
        ),
        Project(
            id="fets-cloud",
            name="fets.cloud",
            description=(
                "Scalable cloud infrastructure dashboard managing exam delivery instances "
                "and secure record storage."
            ),
            status=ProjectStatus.COMPLETED,
            website_url="https://fets.cloud",
            repo_url="https://github.com/forun/fets-cloud",
            image_url=_image("photo-1451187580459-43490279c0fa"),
            tech_stack=["AWS", "Docker", "Kubernetes"],
            files="infra/\n  terraform/\n    main.tf\n  k8s/\n    deployment.yaml",
            created_at=now - 3_000_000,
            git_state=_repo(
                "https://github.com/forun/fets-cloud.git", commits=12, synced_ago_ms=100_000
            ),
        ),
        Project(
            id="fets-cash",
            name="fets.cash",
            description=(
                "Secure payment gateway and financial transaction management system for "
                "examination fees and booking settlements."
            ),
            status=ProjectStatus.IN_PROGRESS,
            website_url="https://fets.cash",
            image_url=_image("photo-1556742049-0cfed4f7a07d"),
            tech_stack=["Stripe API", "Express", "React"],
            files="api/\n  payments.ts\n  webhooks.ts",
            created_at=now - 4_000_000,
        ),
        Project(
            id="fets-in",
            name="fets.in",
            description=(
                "Regional gateway for Indian operations. Handles localized exam scheduling, "
                "payment processing via Razorpay, and regional compliance reporting."
            ),
            status=ProjectStatus.COMPLETED,
            website_url="https://fets.in",
            repo_url="https://github.com/forun/fets-in",
            image_url=_image("photo-1524492412937-b28074a5d7da"),
            tech_stack=["Next.js", "Razorpay", "Tailwind"],
            files="pages/\n  index.tsx\n  compliance.tsx",
            created_at=now - 4_500_000,
            git_state=_repo(
                "https://github.com/forun/fets-in.git", commits=8, synced_ago_ms=120_000
            ),
        ),
        Project(
            id="fetscore-in",
            name="fetscore.in",
            description=(
                "Centralized scoring engine and result processing core. Provides "
                "low-latency API endpoints for real-time grade calculation."
            ),
            status=ProjectStatus.IN_PROGRESS,
            website_url="https://fetscore.in",
            repo_url="https://github.com/forun/fetscore",
            image_url=_image("photo-1558494949-ef526b01201b"),
            tech_stack=["Rust", "GraphQL", "PostgreSQL"],
            files="src/\n  engine/\n    calculator.rs",
            created_at=now - 4_800_000,
            git_state=_repo(
                "https://github.com/forun/fetscore.git",
                branch="dev",
                commits=2,
                synced_ago_ms=500_000,
                pending=1,
            ),
        ),
        Project(
            id="prometric-portal",
            name="Prometric Portal",
            description="Candidate scheduling and result management for Prometric exams.",
            status=ProjectStatus.COMPLETED,
            website_url="https://www.prometric.com",
            tech_stack=["External", "Portal"],
            files="N/A - External Link",
            created_at=now - 5_000_000,
        ),
        Project(
            id="pearson-portal",
            name="Pearson VUE Navigator",
            description=(
                "Access to Pearson VUE testing systems for administrators and test centers."
            ),
            status=ProjectStatus.COMPLETED,
            website_url="https://home.pearsonvue.com",
            tech_stack=["External", "Portal"],
            files="N/A - External Link",
            created_at=now - 6_000_000,
        ),
        Project(
            id="psi-portal",
            name="PSI Atlas",
            description="PSI licensure and certification exam delivery platform.",
            status=ProjectStatus.COMPLETED,
            website_url="https://www.psiexams.com",
            tech_stack=["External", "Portal"],
            files="N/A - External Link",
            created_at=now - 7_000_000,
        ),
        Project(
            id="cert-cma",
            name="CMA USA Handbook",
            description=(
                "Certified Management Accountant (CMA) exam content outlines and "
                "candidate rules."
            ),
            status=ProjectStatus.COMPLETED,
            tech_stack=["PDF", "Prometric", "Finance"],
            files="docs/\n  CMA_Handbook_2025.pdf",
            created_at=now - 100_000,
            item_type=ItemType.FILE,
        ),
        Project(
            id="cert-ms",
            name="Microsoft Cert Guidelines",
            description="Role-based certification paths for Azure, Microsoft 365, and Dynamics.",
            status=ProjectStatus.COMPLETED,
            tech_stack=["PDF", "Pearson VUE", "IT"],
            files="docs/\n  MS_Cert_Path_2025.pdf",
            created_at=now - 200_000,
            item_type=ItemType.FILE,
        ),
        Project(
            id="cert-rcs",
            name="RCS England Protocols",
            description=(
                "Royal College of Surgeons exam delivery standards and surgical "
                "assessment criteria."
            ),
            status=ProjectStatus.COMPLETED,
            tech_stack=["PDF", "Pearson VUE", "Medical"],
            files="docs/\n  RCS_Exam_Regulations.pdf",
            created_at=now - 300_000,
            item_type=ItemType.FILE,
        ),
        Project(
            id="cert-aws",
            name="AWS Security Standards",
            description=(
                "Compliance requirements for hosting AWS certification exams via fets.cloud."
            ),
            status=ProjectStatus.COMPLETED,
            tech_stack=["PDF", "AWS", "Security"],
            files="docs/\n  AWS_Facility_Reqs.pdf",
            created_at=now - 400_000,
            item_type=ItemType.FILE,
        ),
    ]


def seed_users() -> list[User]:
    return [
        User(
            id="1",
            name="System Administrator",
            email="admin@fets.dev",
            role=UserRole.ADMIN,
            avatar_url="https://api.dicebear.com/7.x/avataaars/svg?seed=Admin",
        ),
        User(
            id="2",
            name="Lead Proctor",
            email="proctor@fets.dev",
            role=UserRole.DEVELOPER,
            avatar_url="https://api.dicebear.com/7.x/avataaars/svg?seed=Proctor",
        ),
        User(
            id="3",
            name="Center Manager",
            email="manager@fets.dev",
            role=UserRole.EDITOR,
            avatar_url="https://api.dicebear.com/7.x/avataaars/svg?seed=Manager",
        ),
    ]
