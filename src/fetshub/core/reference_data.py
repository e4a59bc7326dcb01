"""Fixed operating-procedure and vendor reference text."""

from __future__ import annotations

from fetshub.models.reference import (
    ExamWindow,
    SOPSection,
    SOPStep,
    SupportContact,
    VendorResource,
)

_SECTIONS = (
    SOPSection(
        id="overview",
        title="Overview & Daily Operations",
        purpose=(
            "To define the standardized procedures for Test Administrators at FETS Online "
            "Examination & Testing Centres, ensuring uniform operations, secure exam delivery, "
            "and effective emergency response."
        ),
        scope=(
            "This SOP applies to all Test Administrators involved in assessment operations "
            "across all FETS branches."
        ),
        responsibilities=[
            "Maintain exam integrity, confidentiality, and fairness.",
            "Execute secure candidate check-in, monitoring, and incident reporting.",
            "Follow emergency protocols and ensure end-of-day compliance.",
        ],
        steps=[
            SOPStep(
                heading="Core Operational Philosophy",
                content=[
                    "Uniformity: Every candidate experiences the same conditions.",
                    "Security: Prevention of malpractice is the primary goal.",
                    "Service: Professional and calm demeanor at all times.",
                ],
            )
        ],
        flow=[
            "Start of Day (T-Minus 60 Min)",
            "Branch Opening & System Checks",
            "Candidate Check-In & Security",
            "Exam Delivery & Active Monitoring",
            "Incident Occurs?",
            "Standard Completion",
            "End of Day Closing",
        ],
    ),
    SOPSection(
        id="opening",
        title="Branch Opening Procedure",
        purpose=(
            "To ensure all facility and technical systems are fully operational before the "
            "first candidate arrives."
        ),
        scope="Daily morning routine for the Test Administrator.",
        responsibilities=[
            "Arrive 1 hour before the first scheduled exam slot.",
            "Ensure physical and digital security of the test center.",
        ],
        steps=[
            SOPStep(
                heading="Facility Inspection",
                content=[
                    "Unlock main entrance and disable night security alarm.",
                    "Switch on main power, lighting, and HVAC systems.",
                    "Inspect exam hall for cleanliness, ventilation, and leftover debris.",
                    "Unlock and inspect lockers for functionality.",
                ],
            ),
            SOPStep(
                heading="Technical Setup",
                content=[
                    "Power on Server PC first, followed by Admin Station.",
                    "Power on all candidate workstations.",
                    "Verify internet connectivity and speed.",
                    "Launch Exam Delivery Software (Proctor Station) and verify connection "
                    "to central servers.",
                    "Test biometric devices and cameras.",
                ],
            ),
            SOPStep(
                heading="Administrative Prep",
                content=[
                    "Review the Daily Schedule Report.",
                    "Print necessary rosters or scratch paper logs.",
                    'Complete the "Pre-Exam Checklist".',
                ],
            ),
        ],
        flow=[
            "Arrive 60 Mins Early",
            "Facility Power & HVAC On",
            "Server & Workstation Boot",
            "Software Connectivity Check",
            "CCTV & Audio Verification",
            "Complete Pre-Exam Checklist",
            "Open Doors for Candidates",
        ],
    ),
    SOPSection(
        id="checkin",
        title="Candidate Check-In Procedure",
        purpose=(
            "To verify candidate identity and prevent unauthorized materials from entering "
            "the testing room."
        ),
        scope="Applies to every candidate entering the facility.",
        responsibilities=[
            "Act as both Greeter and Security Enforcer.",
            "Verify ID authenticity.",
            "Enforce personal item storage policies.",
        ],
        steps=[
            SOPStep(
                heading="Identity Verification",
                content=[
                    "Greet candidate professionally.",
                    "Request valid, government-issued ID (original only).",
                    "Match photo on ID with the candidate standing in front of you.",
                    "Compare ID photo with exam roster/previous attempt photos if available.",
                    "Check ID expiration date and signature.",
                ],
            ),
            SOPStep(
                heading="Security & Storage",
                content=[
                    "Direct candidate to place ALL personal items (phone, watch, wallet, bags) "
                    "in an assigned locker.",
                    "Candidate must turn pockets inside out.",
                    "Inspect eyewear for cameras/electronics.",
                    "Check sleeves and ankles for hidden notes.",
                    "Hand over locker key to candidate.",
                ],
            ),
            SOPStep(
                heading="Exam Admission",
                content=[
                    "Capture candidate photo/biometrics (if required by exam sponsor).",
                    "Provide scratch paper/pencils as per specific exam rules.",
                    'Read the "Exam Rules Script" to the candidate.',
                    "Escort candidate to their assigned workstation.",
                ],
            ),
        ],
        flow=[
            "Candidate Arrival",
            "Greet & Request ID",
            "Verify Identity (Match Photo/Data)",
            "Store Personal Items in Locker",
            "Physical Inspection (Pockets/Glasses)",
            "Capture Biometrics/Log Admit Time",
            "Escort to Workstation",
        ],
    ),
    SOPSection(
        id="monitoring",
        title="Exam Monitoring Procedure",
        purpose=(
            "To detect and prevent academic dishonesty and ensure a distraction-free "
            "environment."
        ),
        scope="Duration of all active exam sessions.",
        responsibilities=[
            "Maintain constant visual and audio surveillance.",
            "Address technical issues immediately.",
            "Log all irregularities.",
        ],
        steps=[
            SOPStep(
                heading="Surveillance Requirements",
                content=[
                    "NEVER leave the monitoring area unattended while candidates are testing.",
                    "Keep surveillance audio ON to hear whispering or unauthorized noises.",
                    "Monitor screen views on the Admin Station for unauthorized applications.",
                ],
            ),
            SOPStep(
                heading="Active Proctoring",
                content=[
                    "Perform a silent physical walk-through of the exam room every "
                    "15-20 minutes.",
                    "Stand behind candidates (out of immediate view) to observe behavior.",
                    "Look for: Excessive fidgeting, looking at other screens, mouthing words, "
                    "reaching into pockets.",
                ],
            ),
            SOPStep(
                heading="Intervention",
                content=[
                    "If a minor rule is broken (e.g., talking to self), issue a soft warning.",
                    "If fraud is observed (e.g., cheat sheet), pause exam immediately and "
                    "confiscate evidence.",
                    "Log all breaks, technical errors, and warnings in the Daily Occurrence Book.",
                ],
            ),
        ],
        flow=[
            "Active Testing Session",
            "CCTV/Screen Monitoring",
            "Physical Walkthrough (15m)",
            "Irregularity Observed?",
            "Minor: Issue Warning",
            "Major: Terminate Exam",
            "Log Incident in Report",
        ],
    ),
    SOPSection(
        id="emergency",
        title="Emergency & Incident Response",
        purpose=(
            "To ensure safety of candidates and integrity of exam data during unforeseen events."
        ),
        scope="Power outages, fire alarms, medical emergencies, or server failures.",
        responsibilities=[
            "Prioritize human safety above exam results.",
            "Communicate clearly and calmly.",
            "Report to FETS HQ immediately.",
        ],
        steps=[
            SOPStep(
                heading="Power Failure / Technical Crash",
                content=[
                    "Immediately note the time of failure.",
                    "Ask candidates to remain seated; do not let them leave the room.",
                    "Check UPS/Generator status.",
                    "If outage > 10 mins, contact Vendor Support Helpline.",
                    'If exam cannot resume, file "Exam Interruption Report" for rescheduling.',
                ],
            ),
            SOPStep(
                heading="Fire / Building Evacuation",
                content=[
                    "Stop all exams immediately.",
                    "Instruct candidates to leave belongings and evacuate via nearest exit.",
                    "Take the Daily Attendance Roster with you.",
                    "Conduct head count at assembly point.",
                    "Notify FETS Management.",
                ],
            ),
        ],
        flow=[
            "Incident Triggered",
            "Technical / Power",
            "Pause Exam Timer",
            "Contact Support",
            "Safety / Fire",
            "Evacuate Immediately",
            "Headcount Outside",
            "File Incident Report",
        ],
    ),
    SOPSection(
        id="closing",
        title="End-of-Day Closing Procedure",
        purpose="To secure the facility and data after operations conclude.",
        scope="Daily evening routine.",
        responsibilities=[
            "Verify all candidates have departed.",
            "Secure data and hardware.",
            "Power down facility.",
        ],
        steps=[
            SOPStep(
                heading="Operational Shutdown",
                content=[
                    "Ensure all candidates have finished exams and collected belongings.",
                    "Verify all lockers are empty and keys returned.",
                    "Collect used scratch paper and shred/store securely.",
                    "Upload any offline exam logs to the central server.",
                ],
            ),
            SOPStep(
                heading="Facility Shutdown",
                content=[
                    "Shut down all candidate workstations.",
                    "Shut down Admin and Server PCs (unless night updates scheduled).",
                    "Turn off lights and HVAC.",
                    "Ensure windows and emergency exits are locked.",
                    "Activate security alarm system.",
                    "Lock main entrance.",
                ],
            ),
            SOPStep(
                heading="Reporting",
                content=[
                    'Complete the "Post-Exam Checklist".',
                    'Send "End of Day Report" email to Supervisors.',
                ],
            ),
        ],
        flow=[
            "Last Candidate Departs",
            "Verify Lockers Empty",
            "Upload Exam Logs",
            "System Shutdown",
            "Facility Secure",
            "Post-Exam Checklist",
            "Activate Alarm & Leave",
        ],
    ),
    SOPSection(
        id="compliance",
        title="Compliance & Penalties",
        purpose="To outline the consequences of failing to adhere to FETS SOPs.",
        scope="All employees and contractors.",
        responsibilities=[
            "Adhere strictly to all outlined procedures.",
            "Report any witnessed non-compliance.",
        ],
        steps=[
            SOPStep(
                heading="Zero Tolerance Policy",
                content=[
                    "Collusion with candidates (helping them cheat) results in immediate "
                    "termination and legal action.",
                    "Theft of exam content is a criminal offense.",
                ],
            ),
            SOPStep(
                heading="Consequences of SOP Breach",
                content=[
                    "Minor (Procedural): Retraining and Written Warning.",
                    "Major (Security/Integrity): Suspension pending investigation.",
                    "Critical (Fraud/Theft): Contract termination and Blacklisting.",
                ],
            ),
            SOPStep(
                heading="Guidance",
                content=[
                    "When unsure about a procedure, ALWAYS consult your immediate supervisor.",
                    "Ignorance of the SOP is not a valid defense.",
                ],
            ),
        ],
        flow=[
            "SOP Violation Detected",
            "Minor: Warning",
            "Major: Suspension",
            "Critical: Termination",
        ],
    ),
)

SOP_SECTIONS: dict[str, SOPSection] = {section.id: section for section in _SECTIONS}

VENDOR_RESOURCES: dict[str, VendorResource] = {
    "Prometric": VendorResource(
        id="prometric",
        name="Prometric",
        description=(
            "Leading global provider of comprehensive testing and assessment services. "
            "Delivers the CMA USA and other high-stakes professional certifications."
        ),
        rules=[
            "Two forms of valid government-issued ID required (Primary & Secondary).",
            "Full body scan via metal detector wand upon entry.",
            "No personal items in testing room; lockers provided.",
            "Arrive 30 minutes prior to appointment time.",
        ],
        support=SupportContact(
            phone="1-800-853-6769",
            email="candidate.care@prometric.com",
            url="https://www.prometric.com",
        ),
        exams=[
            ExamWindow(
                name="CMA USA (Certified Management Accountant)",
                window="Jan/Feb, May/Jun, Sep/Oct",
                guidelines="Financial planning, performance, and analytics.",
            ),
            ExamWindow(
                name="USMLE Step 1 & 2",
                window="Year-round",
                guidelines="Biometric check-in mandatory.",
            ),
            ExamWindow(
                name="TOEFL iBT",
                window="Continuous",
                guidelines="Headset check required during tutorial.",
            ),
        ],
        logo_url="https://logo.clearbit.com/prometric.com",
    ),
    "Pearson VUE": VendorResource(
        id="pearson",
        name="Pearson VUE",
        description=(
            "The global leader in computer-based testing, delivering exams for Microsoft, "
            "RCS England, and AWS."
        ),
        rules=[
            "Palm vein authentication strictly enforced.",
            "Digital signature and photograph required.",
            "Erasable whiteboard provided; no paper allowed.",
            "Glasses inspection required at check-in.",
        ],
        support=SupportContact(
            phone="1-877-392-6433",
            email="support@pearsonvue.com",
            url="https://home.pearsonvue.com",
        ),
        exams=[
            ExamWindow(
                name="Microsoft Certified: Azure Solutions Architect",
                window="On-demand",
                guidelines="Case studies included. Labs may be presented.",
            ),
            ExamWindow(
                name="RCS (Royal College of Surgeons)",
                window="Specific Dates",
                guidelines="High-security protocols. ID must match registration exactly.",
            ),
            ExamWindow(
                name="PTE Academic",
                window="Daily",
                guidelines="AI-scored English language test.",
            ),
        ],
        logo_url="https://logo.clearbit.com/pearsonvue.com",
    ),
    "PSI": VendorResource(
        id="psi",
        name="PSI Services",
        description=(
            "Trusted provider of licensure and certification exams for insurance, real "
            "estate, and government agencies."
        ),
        rules=[
            "Government ID must contain signature.",
            "Remote proctoring: 360-degree room scan required.",
            "No talking or mouthing words during exam.",
            "Calculators permitted only for specific exams.",
        ],
        support=SupportContact(
            phone="1-800-733-9267",
            email="examschedule@psionline.com",
            url="https://www.psiexams.com",
        ),
        exams=[
            ExamWindow(
                name="Real Estate Salesperson & Broker",
                window="State dependent",
                guidelines="State-specific law components included.",
            ),
            ExamWindow(
                name="Insurance Producer (Life/Health)",
                window="Daily",
                guidelines="Instant pass/fail results provided.",
            ),
            ExamWindow(
                name="AWS Cloud Practitioner (PSI Option)",
                window="On-demand",
                guidelines="Foundational cloud concepts.",
            ),
        ],
        logo_url="https://logo.clearbit.com/psiexams.com",
    ),
    "FETS": VendorResource(
        id="fets",
        name="Forun Educational & Testing Services",
        description=(
            "Internal testing operations, staff training, and compliance hub for Forun centers."
        ),
        rules=[
            "Employee ID badge must be worn visible.",
            "Yellow lockers designated for staff personal items.",
            "Clean desk policy in reception and proctor stations.",
            "Annual NDA and security training renewal.",
        ],
        support=SupportContact(
            phone="+1 (555) 012-3456",
            email="ops@forun.edu",
            url="https://fets.hub",
        ),
        exams=[
            ExamWindow(
                name="TCA (Test Center Administrator) Cert",
                window="Monthly",
                guidelines="Policy mastery and incident reporting.",
            ),
            ExamWindow(
                name="Proctor L2 Authorization",
                window="Quarterly",
                guidelines="Advanced monitoring and intervention techniques.",
            ),
            ExamWindow(
                name="IT Infrastructure Safety",
                window="Annual",
                guidelines="Server room protocols and network security.",
            ),
        ],
    ),
}
