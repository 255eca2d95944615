from models import CharacterInfo

# 8 Halloween characters, each owning two MBTI codes (xxxJ / xxxP).
CHARACTER_DESCRIPTIONS = {
    'zombie': {
        'name': '좀비',
        'description': '한번 정한 목표는 끝까지 밀어붙이는 현실파 리더. 지치지 않는 추진력으로 무리를 이끌고, 계획대로 일이 굴러갈 때 가장 큰 만족을 느낍니다.',
        'imagePath': '/assets/characters/zombie.png',
        'mbtiTypes': ('ESTJ', 'ESTP'),
    },
    'joker': {
        'name': '조커',
        'description': '번뜩이는 아이디어와 말솜씨로 판을 뒤집는 전략가. 논쟁을 즐기고, 남들이 보지 못한 가능성을 찾아내 모두를 놀라게 합니다.',
        'imagePath': '/assets/characters/joker.png',
        'mbtiTypes': ('ENTJ', 'ENTP'),
    },
    'skeleton': {
        'name': '해골',
        'description': '겉모습보다 본질을 꿰뚫어 보는 이상주의자. 조용하지만 깊은 내면의 세계를 가지고 있으며, 의미 있는 관계를 소중히 여깁니다.',
        'imagePath': '/assets/characters/skeleton.png',
        'mbtiTypes': ('INFJ', 'INFP'),
    },
    'nun': {
        'name': '수녀',
        'description': '묵묵히 주변을 돌보는 따뜻한 수호자. 세심한 배려와 성실함으로 사람들에게 안정감을 주고, 약속을 누구보다 소중히 지킵니다.',
        'imagePath': '/assets/characters/nun.png',
        'mbtiTypes': ('ISFJ', 'ISFP'),
    },
    'jack-o-lantern': {
        'name': '잭오랜턴',
        'description': '어둠 속에서도 환하게 빛나는 분위기 메이커. 사람들의 마음에 불을 밝히는 열정과 공감 능력으로 어디서든 환영받습니다.',
        'imagePath': '/assets/characters/jack-o-lantern.png',
        'mbtiTypes': ('ENFJ', 'ENFP'),
    },
    'vampire': {
        'name': '뱀파이어',
        'description': '냉철한 판단력을 지닌 고독한 귀족. 감정에 휘둘리지 않고 사실과 논리로 움직이며, 필요한 순간에 정확하게 실력을 발휘합니다.',
        'imagePath': '/assets/characters/vampire.png',
        'mbtiTypes': ('ISTJ', 'ISTP'),
    },
    'ghost': {
        'name': '유령',
        'description': '어디에나 스르륵 나타나 즐거움을 퍼뜨리는 인싸. 지금 이 순간을 즐길 줄 알고, 사람들 사이의 분위기를 누구보다 빨리 읽어냅니다.',
        'imagePath': '/assets/characters/ghost.png',
        'mbtiTypes': ('ESFJ', 'ESFP'),
    },
    'frankenstein': {
        'name': '프랑켄슈타인',
        'description': '끊임없이 무언가를 만들어내는 천재 발명가. 복잡한 문제를 분석하고 해체하는 것을 즐기며, 자신만의 방식으로 세상을 재조립합니다.',
        'imagePath': '/assets/characters/frankenstein.png',
        'mbtiTypes': ('INTJ', 'INTP'),
    },
}

PLACEHOLDER_IMAGE = '/assets/characters/placeholder.png'


def get_character_info(character):
    """캐릭터 태그로 CharacterInfo 를 조회합니다 (없으면 None)"""
    data = CHARACTER_DESCRIPTIONS.get(character)
    if data is None:
        return None
    return CharacterInfo(
        name=data['name'],
        description=data['description'],
        image_path=data['imagePath'],
        mbti_types=data['mbtiTypes'],
    )
