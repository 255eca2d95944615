"""
공용 HTML 조각 (head, 헤더)
"""
from markupsafe import Markup, escape

# ========================================
# 공통 HTML 헤더 (모든 페이지에서 사용)
# ========================================
COMMON_HEAD = Markup("""
<meta charset="utf-8"/><meta name="viewport" content="width=device-width, initial-scale=1.0"/>
<link href="https://fonts.googleapis.com/css2?family=Creepster&family=Noto+Sans+KR:wght@400;600;700;900&display=swap" rel="stylesheet"/>
<script src="https://cdn.tailwindcss.com?plugins=forms"></script>
<script>
    tailwind.config = {
        theme: {
            extend: {
                colors: {
                    'halloween-orange': '#ff6b35',
                    'halloween-purple': '#6a0dad',
                    'halloween-green': '#39ff14',
                    'halloween-blood': '#8b0000',
                    'halloween-dark': '#1a1a2e',
                    'halloween-darker': '#0f0f1a',
                },
                fontFamily: {
                    spooky: ['Creepster', 'cursive'],
                    korean: ['"Noto Sans KR"', 'sans-serif'],
                },
            },
        },
    };
</script>
<style>body { font-family: 'Noto Sans KR', sans-serif; }</style>
""")

PAGE_BACKGROUND = "min-h-screen bg-gradient-to-b from-halloween-darker via-halloween-dark to-halloween-darker"


def get_header(current_page, email_auth=False, user=None):
    """현재 페이지에 따른 네비게이션 헤더 반환"""
    auth_html = ""

    if email_auth:
        if user is not None:
            profile_class = "text-halloween-orange" if current_page == 'profile' else "text-gray-300 hover:text-halloween-orange"
            auth_html = """
                    <span class="hidden md:block text-sm text-gray-400">""" + str(escape(user.email)) + """</span>
                    <a href="/profile" class=\"""" + profile_class + """ text-sm font-medium transition-colors">내 프로필</a>
                    <form method="post" action="/auth/logout">
                        <button type="submit" class="text-sm text-gray-400 hover:text-halloween-blood transition-colors">로그아웃</button>
                    </form>"""
        elif current_page not in ('email', 'verify'):
            auth_html = """
                    <a href="/auth/email" class="text-gray-300 hover:text-halloween-orange text-sm font-medium transition-colors">이메일 인증</a>"""

    nav_html = """
    <header id="site-header" class="sticky top-0 z-[80] border-b border-halloween-purple/30 bg-halloween-darker/90 backdrop-blur-sm">
        <div class="max-w-5xl mx-auto flex items-center justify-between px-6 py-4">
            <a href="/" class="hover:opacity-80 transition-opacity">
                <h2 class="font-spooky text-2xl text-halloween-orange">🎃 Halloween Test</h2>
            </a>
            <div class="flex items-center gap-4">""" + auth_html + """
            </div>
        </div>
    </header>
"""
    return Markup(nav_html)
