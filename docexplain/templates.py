"""Template banks used to assemble explanations, keyed by domain."""

from dataclasses import dataclass
from typing import Dict, Sequence


@dataclass(frozen=True)
class TemplateBank:
    """Fixed candidate strings for one domain.

    Summary sentences are ``str.format`` templates with ``{complexity}``,
    ``{terms}`` and ``{topics}`` slots.
    """

    summary: Sequence[str]
    default_terms: str
    default_topics: str
    analogies: Sequence[str]
    code_example: str
    use_cases: Sequence[str]
    key_points: Sequence[str]


ADVANCED_ADVISORY = "This is an advanced topic - make sure you understand the fundamentals first"
KEY_TERMS_POINT = "Key terminology to remember: {terms}"
TOPIC_USE_CASE = "When working with {topic} in your applications"


UI_FRAMEWORK = TemplateBank(
    summary=(
        "This React documentation explains concepts that are essential for building modern component-based interfaces.",
        "The content covers {complexity}-level React patterns including {terms}.",
        "Understanding these concepts will help you write more efficient and maintainable components.",
        "Key areas include {topics}.",
    ),
    default_terms="components, props and rendering",
    default_topics="fundamental React development patterns",
    analogies=(
        "Think of React components like LEGO blocks - each component is a reusable piece that you can combine with others to build complex structures. Props are like the connection points that let blocks share information, while state is like the internal memory that helps each block remember its current configuration.",
        "React is like a smart assistant that watches your data and automatically updates your website when anything changes. It's like having a personal secretary who immediately rewrites your presentation slides whenever you change the underlying data.",
        "Using React hooks is like having a toolbox where each tool has a specific purpose. useState is your memory tool, useEffect is your scheduling assistant, and other hooks are specialized tools that help you solve specific problems.",
    ),
    code_example="""import React, { useState, useEffect } from 'react';

function ExampleComponent() {
  const [data, setData] = useState(null);
  const [loading, setLoading] = useState(true);

  useEffect(() => {
    const fetchData = async () => {
      try {
        const response = await fetch('/api/data');
        const result = await response.json();
        setData(result);
      } catch (error) {
        console.error('Error:', error);
      } finally {
        setLoading(false);
      }
    };

    fetchData();
  }, []);

  if (loading) return <div>Loading...</div>;
  if (!data) return <div>No data found</div>;

  return (
    <div>
      <h2>{data.title}</h2>
      <p>{data.description}</p>
    </div>
  );
}""",
    use_cases=(
        "Building interactive user interfaces with dynamic data",
        "Managing component state and handling user interactions",
        "Fetching and displaying data from APIs",
        "Creating reusable components for consistent UI patterns",
        "Implementing form handling and validation",
    ),
    key_points=(
        "Components should be pure functions that render the same output for the same props",
        "Always use the dependency array in useEffect to control when effects run",
        "State updates are asynchronous and may be batched for performance",
        "Break down complex components into smaller, focused components",
        "Use proper key props when rendering lists to help React optimize updates",
    ),
)

SCRIPTING = TemplateBank(
    summary=(
        "This JavaScript documentation covers {complexity}-level concepts including {terms}.",
        "The material explains core language functionality that's essential for modern web development.",
        "These concepts form the foundation for understanding more advanced JavaScript patterns.",
        "Main topics include {topics}.",
    ),
    default_terms="functions, variables and control flow",
    default_topics="essential JavaScript fundamentals",
    analogies=(
        "JavaScript functions are like recipes in a cookbook - they take ingredients (parameters), follow specific steps, and produce a result. You can use the same recipe over and over with different ingredients to get different outcomes.",
        "Think of JavaScript promises like ordering food at a restaurant. You place your order (make the request), get a receipt with a promise that your food will come (the Promise object), and then either receive your meal (resolve) or get told the kitchen is out of ingredients (reject).",
        "JavaScript closures are like a backpack that a function carries around. Even when the function travels to different parts of your code, it still has access to all the variables it packed in its backpack from where it was created.",
    ),
    code_example="""// Example implementation
function processData(input) {
  return new Promise((resolve, reject) => {
    setTimeout(() => {
      if (input && input.length > 0) {
        const result = input.map(item => ({
          ...item,
          processed: true,
          timestamp: Date.now()
        }));
        resolve(result);
      } else {
        reject(new Error('Invalid input data'));
      }
    }, 1000);
  });
}

// Usage
processData(myData)
  .then(result => console.log('Success:', result))
  .catch(error => console.error('Error:', error));""",
    use_cases=(
        "Processing and transforming data in web applications",
        "Handling asynchronous operations and API calls",
        "Creating interactive functionality on websites",
        "Building reusable utility functions and modules",
        "Implementing business logic and data validation",
    ),
    key_points=(
        "Understand the difference between synchronous and asynchronous code execution",
        "Always handle errors properly with try-catch blocks or .catch() methods",
        "Use const and let instead of var for better scope management",
        "Functions are first-class objects and can be passed as arguments",
        "Be aware of 'this' binding context in different function types",
    ),
)

NETWORK_API = TemplateBank(
    summary=(
        "This API documentation explains how to interact with web services and handle data communication.",
        "It covers {complexity}-level concepts including {terms}.",
        "Understanding these patterns is crucial for building applications that communicate with external services.",
        "Key areas covered: {topics}.",
    ),
    default_terms="requests, responses and endpoints",
    default_topics="API integration patterns",
    analogies=(
        "APIs are like waiters in a restaurant. You (the client) tell the waiter (API) what you want from the menu (available endpoints), and the waiter goes to the kitchen (server) to get your order and brings back your food (data).",
        "Think of API endpoints like different departments in a company. Each department (endpoint) handles specific types of requests - HR for employee data, Accounting for financial data, etc. You need to know which department to contact for what you need.",
        "API authentication is like having a membership card at an exclusive club. You show your card (API key) at the door, and if it's valid, you get access to all the club's services. Without it, you're turned away.",
    ),
    code_example="""// API interaction example
const apiClient = {
  baseURL: 'https://api.example.com',

  async get(endpoint) {
    const response = await fetch(`${this.baseURL}${endpoint}`, {
      headers: {
        'Authorization': 'Bearer ' + getToken(),
        'Content-Type': 'application/json'
      }
    });

    if (!response.ok) {
      throw new Error(`HTTP error! status: ${response.status}`);
    }

    return response.json();
  },

  async post(endpoint, data) {
    const response = await fetch(`${this.baseURL}${endpoint}`, {
      method: 'POST',
      headers: {
        'Authorization': 'Bearer ' + getToken(),
        'Content-Type': 'application/json'
      },
      body: JSON.stringify(data)
    });

    return response.json();
  }
};

// Usage
const userData = await apiClient.get('/users/123');
const newUser = await apiClient.post('/users', { name: 'John', email: 'john@example.com' });""",
    use_cases=(
        "Integrating third-party services into your application",
        "Building client-server communication for web apps",
        "Creating data synchronization between different systems",
        "Implementing authentication and authorization flows",
        "Handling real-time data updates and notifications",
    ),
    key_points=(
        "Always validate and sanitize data received from external APIs",
        "Implement proper error handling for network failures and timeouts",
        "Use appropriate HTTP methods (GET, POST, PUT, DELETE) for different operations",
        "Include proper authentication headers and handle token expiration",
        "Consider rate limiting and implement retry logic for failed requests",
    ),
)

STYLING = TemplateBank(
    summary=(
        "This CSS documentation explains how to control the presentation and layout of web pages.",
        "It covers {complexity}-level styling concepts including {terms}.",
        "Mastering these rules helps you build interfaces that look consistent across browsers and screen sizes.",
        "Main areas include {topics}.",
    ),
    default_terms="selectors, properties and the cascade",
    default_topics="core styling and layout techniques",
    analogies=(
        "CSS is like the interior design plan for a house. The HTML is the structure - walls, rooms and doors - while CSS decides the paint colors, furniture placement and lighting for every room.",
        "Think of CSS selectors like addressing envelopes. A class selector is a mailing list that reaches many houses, an ID selector is one specific street address, and the cascade decides which letter wins when several arrive at the same door.",
        "Responsive design with media queries is like clothing that adjusts to the weather. The same outfit adds a jacket when it's cold (small screens) and rolls up its sleeves when it's warm (large screens), without changing who is wearing it.",
    ),
    code_example="""/* Responsive card layout */
.card-grid {
  display: grid;
  grid-template-columns: repeat(auto-fill, minmax(240px, 1fr));
  gap: 1.5rem;
}

.card {
  padding: 1rem;
  border-radius: 0.75rem;
  box-shadow: 0 1px 3px rgba(0, 0, 0, 0.12);
  transition: transform 0.2s ease;
}

.card:hover {
  transform: translateY(-2px);
}

@media (max-width: 640px) {
  .card-grid {
    grid-template-columns: 1fr;
  }
}""",
    use_cases=(
        "Building responsive layouts that adapt to any screen size",
        "Creating consistent visual themes across an application",
        "Adding transitions and animations to interactive elements",
        "Organizing styles into reusable utility classes",
        "Implementing accessible color contrast and typography",
    ),
    key_points=(
        "Understand specificity and the cascade before reaching for !important",
        "Prefer flexbox and grid over floats for modern layouts",
        "Design mobile-first and layer on media queries for larger screens",
        "Keep selectors shallow to make styles easier to override",
        "Use custom properties (CSS variables) to share design tokens",
    ),
)

GENERIC = TemplateBank(
    summary=(
        "This technical documentation explains {complexity}-level concepts that are important for software development.",
        "The content covers {terms} and related topics.",
        "These concepts will help you understand and implement the described functionality effectively.",
        "Main areas include {topics}.",
    ),
    default_terms="the core ideas it introduces",
    default_topics="essential technical knowledge",
    analogies=(
        "Think of this technical concept like learning to drive a car. At first, all the controls seem overwhelming, but once you understand what each part does and practice using them together, it becomes second nature.",
        "This is like learning a new language - you start with basic vocabulary (core concepts), learn grammar rules (syntax and patterns), and then practice combining words into sentences (implementing solutions).",
        "Understanding this documentation is like following a detailed map. It shows you where you are (current state), where you want to go (desired outcome), and the best routes to get there (implementation steps).",
    ),
    code_example="""// Example implementation based on the documentation
function implementFeature(config) {
  const settings = {
    enabled: true,
    timeout: 5000,
    retries: 3,
    ...config
  };

  return {
    execute: async (data) => {
      let attempts = 0;

      while (attempts < settings.retries) {
        try {
          const result = await processWithTimeout(data, settings.timeout);
          return { success: true, data: result };
        } catch (error) {
          attempts++;
          if (attempts >= settings.retries) {
            throw error;
          }
          await delay(1000 * attempts);
        }
      }
    },

    configure: (newConfig) => {
      Object.assign(settings, newConfig);
    }
  };
}""",
    use_cases=(
        "Implementing the specific functionality described in the documentation",
        "Solving common development challenges in your projects",
        "Building scalable and maintainable software solutions",
        "Following best practices for code organization and structure",
        "Creating robust error handling and edge case management",
    ),
    key_points=(
        "Read the documentation thoroughly before implementing",
        "Test your implementation with different inputs and edge cases",
        "Follow the recommended patterns and best practices",
        "Consider performance implications and optimization opportunities",
        "Keep your code clean, readable, and well-documented",
    ),
)

TEMPLATE_BANKS: Dict[str, TemplateBank] = {
    "generic": GENERIC,
    "ui-framework": UI_FRAMEWORK,
    "scripting": SCRIPTING,
    "network-api": NETWORK_API,
    "styling": STYLING,
}


def bank_for(domain: str) -> TemplateBank:
    """Return the bank for a domain, falling back to the generic bank."""
    return TEMPLATE_BANKS.get(domain, GENERIC)
