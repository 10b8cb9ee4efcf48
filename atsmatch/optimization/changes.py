from __future__ import annotations

from atsmatch.compliance.checker import resume_text
from atsmatch.normalize.utils import contains_ci, dedupe_preserving_order, normalize_skill, words
from atsmatch.schemas import CandidateProfile, EnhancedSection, OptimizationChange, TechnicalSkills

_CONTACT_FIELDS = ("phone", "linkedin", "github", "website")
_TECH_BUCKETS = ("frontend", "backend", "database", "tools")
_NARRATIVE_FIELDS = ("communication", "leadership")


def _introduced_keywords(old: str | None, new: str | None, keywords: list[str]) -> list[str]:
    return [keyword for keyword in keywords if contains_ci(new, keyword) and not contains_ci(old, keyword)]


def _added_items(before: list[str], after: list[str]) -> list[str]:
    seen = {normalize_skill(item) for item in before}
    return [item for item in after if normalize_skill(item) not in seen]


def track_changes(
    original: CandidateProfile, optimized: CandidateProfile, keywords: list[str]
) -> list[OptimizationChange]:
    changes: list[OptimizationChange] = []

    if original.objective != optimized.objective:
        changes.append(
            OptimizationChange(
                section="objective",
                field="objective",
                change_type="MODIFIED",
                original_value=original.objective,
                new_value=optimized.objective,
                reason="Enhanced with relevant keywords for ATS optimization",
                keywords=_introduced_keywords(original.objective, optimized.objective, keywords),
            )
        )

    added_skills = _added_items(original.skills, optimized.skills)
    if added_skills:
        changes.append(
            OptimizationChange(
                section="skills",
                field="skills",
                change_type="ADDED",
                original_value=", ".join(original.skills),
                new_value=", ".join(added_skills),
                reason="Added missing skills required by the job posting",
                keywords=added_skills,
            )
        )

    for index, (before, after) in enumerate(zip(original.experience, optimized.experience)):
        if before.description == after.description:
            continue
        changes.append(
            OptimizationChange(
                section="experience",
                field=f"experience[{index}].description",
                change_type="ENHANCED",
                original_value=before.description,
                new_value=after.description,
                reason="Enhanced description with relevant keywords and achievements",
                keywords=_introduced_keywords(before.description, after.description, keywords),
            )
        )

    before_tech = original.technical_skills or TechnicalSkills()
    after_tech = optimized.technical_skills or TechnicalSkills()
    for bucket in _TECH_BUCKETS:
        added = _added_items(getattr(before_tech, bucket), getattr(after_tech, bucket))
        if added:
            changes.append(
                OptimizationChange(
                    section="technical_skills",
                    field=f"technical_skills.{bucket}",
                    change_type="ADDED",
                    original_value=", ".join(getattr(before_tech, bucket)),
                    new_value=", ".join(added),
                    reason=f"Categorized job-relevant skills under {bucket}",
                    keywords=added,
                )
            )

    for name in _NARRATIVE_FIELDS:
        before_text = getattr(original, name) or ""
        after_text = getattr(optimized, name) or ""
        if before_text == after_text or not after_text:
            continue
        changes.append(
            OptimizationChange(
                section=name,
                field=name,
                change_type="ADDED" if not before_text.strip() else "MODIFIED",
                original_value=before_text or None,
                new_value=after_text,
                reason=f"Added quantified {name} achievements",
            )
        )

    known_projects = {normalize_skill(project.name) for project in original.projects}
    for project in optimized.projects:
        if normalize_skill(project.name) in known_projects:
            continue
        changes.append(
            OptimizationChange(
                section="projects",
                field="projects",
                change_type="ADDED",
                new_value=project.name,
                reason="Added a project demonstrating required skills",
                keywords=[item.strip() for item in project.technologies.split(",") if item.strip()],
            )
        )

    for name in _CONTACT_FIELDS:
        before_value = getattr(original.personal_info, name)
        after_value = getattr(optimized.personal_info, name)
        if before_value != after_value and after_value is not None:
            changes.append(
                OptimizationChange(
                    section="personal_info",
                    field=f"personal_info.{name}",
                    change_type="MODIFIED",
                    original_value=before_value,
                    new_value=after_value,
                    reason="Normalized contact details for ATS parsing",
                )
            )

    if original.section_order != optimized.section_order:
        changes.append(
            OptimizationChange(
                section="section_order",
                field="section_order",
                change_type="REORDERED",
                original_value=", ".join(original.section_order),
                new_value=", ".join(optimized.section_order),
                reason="Placed technical skills ahead of experience for a technical role",
            )
        )

    return changes


def _section_size(profile: CandidateProfile, section: str) -> int:
    if section == "objective":
        return len(profile.objective)
    if section == "skills":
        return len(profile.skills)
    if section == "experience":
        return sum(len(exp.description or "") for exp in profile.experience)
    if section == "technical_skills":
        return len(profile.technical_skills.all_skills()) if profile.technical_skills else 0
    if section in _NARRATIVE_FIELDS:
        return len(getattr(profile, section) or "")
    if section == "projects":
        return len(profile.projects)
    if section == "personal_info":
        return sum(len(getattr(profile.personal_info, name) or "") for name in _CONTACT_FIELDS)
    if section == "section_order":
        return len(profile.section_order)
    return 0


def identify_enhanced_sections(
    original: CandidateProfile, optimized: CandidateProfile, changes: list[OptimizationChange]
) -> list[EnhancedSection]:
    grouped: dict[str, list[OptimizationChange]] = {}
    for change in changes:
        grouped.setdefault(change.section, []).append(change)

    sections: list[EnhancedSection] = []
    for section, section_changes in grouped.items():
        keywords = dedupe_preserving_order([kw for change in section_changes for kw in change.keywords])
        sections.append(
            EnhancedSection(
                section=section,
                original_length=_section_size(original, section),
                new_length=_section_size(optimized, section),
                added_keywords=keywords,
                improvement_description=(
                    f"Enhanced with {len(section_changes)} improvements including "
                    f"{len(keywords)} new keywords for better ATS compatibility"
                ),
            )
        )
    return sections


def extract_added_keywords(original: CandidateProfile, optimized: CandidateProfile) -> list[str]:
    known = set(words(resume_text(original)))
    fresh = [word for word in words(resume_text(optimized)) if len(word) > 3 and word not in known]
    return dedupe_preserving_order(fresh, key=str)
