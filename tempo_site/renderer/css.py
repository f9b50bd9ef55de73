"""
CSS du site — feuille unique inlinée dans <style> (pas de pipeline d'assets).
"""

SITE_CSS = """
*,*::before,*::after{box-sizing:border-box}
body{margin:0;font-family:Inter,system-ui,-apple-system,sans-serif;color:#111827;background:#fff;line-height:1.6}
a{color:inherit}
img{max-width:100%;height:auto}
.container{max-width:960px;margin:0 auto;padding:0 24px}
.site-header{position:sticky;top:0;z-index:10;background:#fff;border-bottom:1px solid #e5e7eb}
.header-container{display:flex;align-items:center;justify-content:space-between;gap:24px;max-width:1200px;margin:0 auto;padding:12px 24px}
.nav-list,.dropdown-menu,.mobile-nav-list,.mobile-dropdown-menu{list-style:none;margin:0;padding:0}
.nav-list{display:flex;gap:8px}
.nav-item{position:relative}
.nav-link,.login-link{display:inline-flex;align-items:center;gap:4px;padding:8px 12px;text-decoration:none;background:none;border:0;font:inherit;cursor:pointer}
.dropdown-menu{display:none;position:absolute;top:100%;left:0;min-width:220px;background:#fff;border:1px solid #e5e7eb;border-radius:8px;padding:8px}
.nav-group:hover .dropdown-menu,.nav-group:focus-within .dropdown-menu{display:block}
.dropdown-link,.mobile-dropdown-link{display:block;padding:6px 8px;text-decoration:none}
.header-actions{display:flex;align-items:center;gap:12px}
.search-button,.mobile-menu-button{background:none;border:0;cursor:pointer}
.mobile-menu-button,.mobile-nav{display:none}
.hamburger-line{display:block;width:22px;height:2px;margin:4px 0;background:#111827}
@media (max-width:768px){
  .desktop-nav,.header-actions{display:none}
  .mobile-menu-button{display:block}
  .mobile-nav.active{display:block}
}
.hero{padding:120px 24px;text-align:center}
.hero h1{font-size:3rem;margin:0 0 16px}
.hero p{font-size:1.25rem;color:#4b5563}
.blog-header{padding:64px 0 32px}
.description{color:#6b7280}
.posts{display:grid;gap:24px;padding-bottom:64px}
.post-card{border:1px solid #e5e7eb;border-radius:12px;padding:24px}
.post-card a{text-decoration:none}
.post-meta{color:#6b7280;font-size:.9rem}
.tags{display:flex;gap:8px;flex-wrap:wrap;list-style:none;padding:0}
.tag{background:#f3f4f6;border-radius:999px;padding:2px 10px;font-size:.8rem}
.back-link{padding-top:32px}
.featured-image{margin:24px 0;border-radius:12px;overflow:hidden}
.post-content figure{margin:24px 0}
.post-content blockquote{border-left:4px solid #e5e7eb;margin:0;padding-left:16px;color:#4b5563}
"""
