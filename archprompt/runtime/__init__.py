from .renderer import PromptRenderer, PromptTemplate, find_placeholders
