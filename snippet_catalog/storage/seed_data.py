"""
Default categories and demo components for the in-memory store.

Category IDs are assigned in list order starting at 1, so component
``category_id`` values refer to positions in ``DEFAULT_CATEGORIES``.
"""
from typing import List
from pydantic import BaseModel

from ..models import CategoryCreate, ComponentCreate


class SeedData(BaseModel):
    """Records a fresh in-memory store starts with"""
    categories: List[CategoryCreate] = []
    components: List[ComponentCreate] = []


DEFAULT_CATEGORIES = [
    CategoryCreate(name="Buttons", icon="fas fa-hand-pointer", description="Interactive button components"),
    CategoryCreate(name="Headings", icon="fas fa-heading", description="Typography and heading styles"),
    CategoryCreate(name="Sections", icon="fas fa-layer-group", description="Layout sections and containers"),
    CategoryCreate(name="Navigation", icon="fas fa-bars", description="Navigation bars and menus"),
    CategoryCreate(name="Sliders", icon="fas fa-images", description="Image carousels and sliders"),
    CategoryCreate(name="Footers", icon="fas fa-shoe-prints", description="Footer sections and layouts"),
    CategoryCreate(name="GSAP Animations", icon="fas fa-magic", description="GSAP powered animations"),
]

BUTTONS_CATEGORY_ID = 1
HEADINGS_CATEGORY_ID = 2

DEMO_COMPONENTS = [
    ComponentCreate(
        name="Primary Button",
        description="Modern primary action button",
        category_id=BUTTONS_CATEGORY_ID,
        html='<button class="btn-primary">Get Started</button>',
        css="""\
.btn-primary {
  background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
  color: white;
  border: none;
  padding: 12px 24px;
  border-radius: 8px;
  font-weight: 600;
  cursor: pointer;
  transition: transform 0.2s, box-shadow 0.2s;
}

.btn-primary:hover {
  transform: translateY(-2px);
  box-shadow: 0 8px 25px rgba(102, 126, 234, 0.4);
}""",
        js="""\
document.querySelector('.btn-primary').addEventListener('click', function() {
  this.style.transform = 'scale(0.95)';
  setTimeout(() => {
    this.style.transform = 'translateY(-2px)';
  }, 150);
});""",
        tags=["primary", "gradient", "hover"],
    ),
    ComponentCreate(
        name="Glass Button",
        description="Glassmorphism style button",
        category_id=BUTTONS_CATEGORY_ID,
        html='<button class="btn-glass">Glass Effect</button>',
        css="""\
.btn-glass {
  background: rgba(255, 255, 255, 0.2);
  backdrop-filter: blur(10px);
  border: 1px solid rgba(255, 255, 255, 0.3);
  color: white;
  padding: 12px 24px;
  border-radius: 12px;
  font-weight: 500;
  cursor: pointer;
  transition: all 0.3s ease;
}

.btn-glass:hover {
  background: rgba(255, 255, 255, 0.3);
  transform: translateY(-1px);
}""",
        js="""\
// Add ripple effect
document.querySelector('.btn-glass').addEventListener('click', function(e) {
  const ripple = document.createElement('span');
  const rect = this.getBoundingClientRect();
  const size = Math.max(rect.width, rect.height);

  ripple.style.width = ripple.style.height = size + 'px';
  ripple.style.left = (e.clientX - rect.left - size / 2) + 'px';
  ripple.style.top = (e.clientY - rect.top - size / 2) + 'px';
  ripple.classList.add('ripple');

  this.appendChild(ripple);
  setTimeout(() => ripple.remove(), 600);
});""",
        tags=["glass", "glassmorphism", "modern"],
    ),
    ComponentCreate(
        name="Neon Button",
        description="Cyberpunk neon glow button",
        category_id=BUTTONS_CATEGORY_ID,
        html='<button class="btn-neon">NEON</button>',
        css="""\
.btn-neon {
  background: transparent;
  border: 2px solid #00ffff;
  color: #00ffff;
  padding: 12px 24px;
  border-radius: 4px;
  font-weight: bold;
  font-family: 'Courier New', monospace;
  cursor: pointer;
  position: relative;
  text-transform: uppercase;
  letter-spacing: 2px;
  transition: all 0.3s ease;
  box-shadow: 0 0 10px #00ffff;
}

.btn-neon:hover {
  background: #00ffff;
  color: #000;
  box-shadow: 0 0 20px #00ffff, 0 0 40px #00ffff;
  text-shadow: 0 0 5px #000;
}""",
        js="""\
document.querySelector('.btn-neon').addEventListener('mouseenter', function() {
  this.style.animation = 'neonPulse 0.5s infinite alternate';
});

document.querySelector('.btn-neon').addEventListener('mouseleave', function() {
  this.style.animation = '';
});""",
        tags=["neon", "cyberpunk", "glow"],
    ),
    ComponentCreate(
        name="Gradient Title",
        description="Eye-catching gradient headline",
        category_id=HEADINGS_CATEGORY_ID,
        html='<h1 class="gradient-title">Amazing Title</h1>',
        css="""\
.gradient-title {
  font-size: 3rem;
  font-weight: bold;
  background: linear-gradient(45deg, #ff6b6b, #4ecdc4, #45b7d1);
  background-size: 300%;
  background-clip: text;
  -webkit-background-clip: text;
  -webkit-text-fill-color: transparent;
  animation: gradientShift 3s ease-in-out infinite;
}

@keyframes gradientShift {
  0%, 100% { background-position: 0% 50%; }
  50% { background-position: 100% 50%; }
}""",
        js="""\
// Add typing effect
const title = document.querySelector('.gradient-title');
const text = title.textContent;
title.textContent = '';

let i = 0;
function typeWriter() {
  if (i < text.length) {
    title.textContent += text.charAt(i);
    i++;
    setTimeout(typeWriter, 100);
  }
}
typeWriter();""",
        tags=["gradient", "animation", "typing"],
    ),
]

DEMO_SEED = SeedData(categories=DEFAULT_CATEGORIES, components=DEMO_COMPONENTS)
