from storyforge.skills import Skill, SkillLevel


def test_skill_starts_untrained():
    assert Skill().skill_level is SkillLevel.UNTRAINED


def test_levels_are_ordered():
    skill = Skill()
    assert skill.skill_level < SkillLevel.TRAINED < SkillLevel.ADVANCED < SkillLevel.MASTER
    assert max(SkillLevel) is SkillLevel.MASTER


def test_display_name():
    skill = Skill()
    skill.skill_level = SkillLevel.ADVANCED
    assert skill.skill_level.display_name == "Advanced"
    assert Skill().skill_level.display_name == "Untrained"


def test_skill_level_can_be_raised():
    skill = Skill()
    skill.skill_level = SkillLevel.MASTER
    assert skill.skill_level > SkillLevel.TRAINED