'''
Static action plan templates, one per route.

Templates assume a full-time founder and a six-month plan; the plan
generator rescales durations and weekly hours for other commitment levels.
Records are frozen, so a template can be shared safely between calls.
'''

from typing import Dict, Tuple

from funding_advisor.domain.types import ActionPhase
from funding_advisor.domain.types import ActionTask
from funding_advisor.domain.types import BudgetRange
from funding_advisor.domain.types import PlanResource
from funding_advisor.domain.types import TimeRange

BOOTSTRAP_PHASES: Tuple[ActionPhase, ...] = (
    ActionPhase(
        title='Phase 1: Validation',
        duration='Month 1-2',
        tasks=(
            ActionTask(
                id='b1-1',
                title='Run problem interviews',
                description='Talk to 10-20 potential customers about their '
                'problem',
                priority='critical',
                estimated_hours=20,
                tools=('Calendly', 'Zoom', 'Notion'),
                tips=('Ask about behaviour, not opinions',
                      'Record the interviews'),
            ),
            ActionTask(
                id='b1-2',
                title='Build a landing page',
                description='Simple page with value proposition and email '
                'signup',
                priority='high',
                estimated_hours=8,
                tools=('Carrd', 'Webflow', 'Framer'),
            ),
            ActionTask(
                id='b1-3',
                title='First traffic experiment',
                description='Test one marketing channel with a small budget',
                priority='medium',
                estimated_hours=10,
                tools=('Google Ads', 'Reddit Ads', 'Twitter'),
            ),
        ),
        budget=BudgetRange(min=200, max=500),
        time_per_week=TimeRange(min=15, max=25),
        milestones=(
            '10+ customer interviews completed',
            '100+ email signups',
            'Problem-solution fit validated',
        ),
        resources=(PlanResource(
            name='The Mom Test',
            type='course',
            url='https://www.momtestbook.com/',
            cost='paid',
            description='The essential book on customer discovery',
        ),),
    ),
    ActionPhase(
        title='Phase 2: MVP Development',
        duration='Month 2-4',
        tasks=(
            ActionTask(
                id='b2-1',
                title='Build the MVP',
                description='Minimal version with the core feature',
                priority='critical',
                estimated_hours=80,
            ),
            ActionTask(
                id='b2-2',
                title='Recruit beta testers',
                description='5-10 early adopters from the interviews',
                priority='high',
                estimated_hours=5,
            ),
            ActionTask(
                id='b2-3',
                title='Set up a feedback loop',
                description='A system for continuous feedback',
                priority='medium',
                estimated_hours=8,
            ),
        ),
        budget=BudgetRange(min=500, max=2000),
        time_per_week=TimeRange(min=25, max=40),
        milestones=(
            'MVP live',
            '5+ active beta testers',
            'First feature requests documented',
        ),
    ),
    ActionPhase(
        title='Phase 3: First Revenue',
        duration='Month 4-6',
        tasks=(
            ActionTask(
                id='b3-1',
                title='Define pricing',
                description='Set a pricing model based on value',
                priority='critical',
                estimated_hours=10,
            ),
            ActionTask(
                id='b3-2',
                title='Integrate payments',
                description='Set up Stripe, Paddle or similar',
                priority='critical',
                estimated_hours=8,
            ),
            ActionTask(
                id='b3-3',
                title='Win the first paying customers',
                description='Convert beta testers into customers',
                priority='critical',
                estimated_hours=15,
            ),
        ),
        budget=BudgetRange(min=300, max=1000),
        time_per_week=TimeRange(min=20, max=35),
        milestones=(
            'First MRR',
            '10+ paying customers',
            'Unit economics understood',
        ),
    ),
)

INVESTOR_PHASES: Tuple[ActionPhase, ...] = (
    ActionPhase(
        title='Phase 1: Get Investor-Ready',
        duration='Month 1-2',
        tasks=(
            ActionTask(
                id='i1-1',
                title='Create the pitch deck',
                description='10-12 slides in the standard format',
                priority='critical',
                estimated_hours=30,
                tools=('Pitch', 'Canva', 'Figma'),
            ),
            ActionTask(
                id='i1-2',
                title='Build the financial model',
                description='3-5 year projection with assumptions',
                priority='high',
                estimated_hours=20,
                tools=('Google Sheets', 'Causal'),
            ),
            ActionTask(
                id='i1-3',
                title='Prepare the data room',
                description='All documents for due diligence',
                priority='medium',
                estimated_hours=15,
            ),
        ),
        budget=BudgetRange(min=500, max=2000),
        time_per_week=TimeRange(min=20, max=35),
        milestones=(
            'Pitch deck finished',
            'Financial model reviewed',
            'Data room complete',
        ),
    ),
    ActionPhase(
        title='Phase 2: Investor Search',
        duration='Month 2-4',
        tasks=(
            ActionTask(
                id='i2-1',
                title='Build a target list',
                description='Research 50+ relevant investors',
                priority='critical',
                estimated_hours=15,
            ),
            ActionTask(
                id='i2-2',
                title='Organize warm intros',
                description='Use your network for introductions',
                priority='critical',
                estimated_hours=20,
            ),
            ActionTask(
                id='i2-3',
                title='Practice the pitch',
                description='Run 20+ practice pitches',
                priority='high',
                estimated_hours=15,
            ),
        ),
        budget=BudgetRange(min=1000, max=3000),
        time_per_week=TimeRange(min=25, max=40),
        milestones=(
            '50+ investors contacted',
            '10+ first meetings',
            '3+ follow-up meetings',
        ),
    ),
    ActionPhase(
        title='Phase 3: Closing',
        duration='Month 4-6',
        tasks=(
            ActionTask(
                id='i3-1',
                title='Negotiate term sheets',
                description='Understand and negotiate the terms',
                priority='critical',
                estimated_hours=25,
            ),
            ActionTask(
                id='i3-2',
                title='Prepare the legal side',
                description='A lawyer for the investment documents',
                priority='critical',
                estimated_hours=20,
            ),
            ActionTask(
                id='i3-3',
                title='Support due diligence',
                description='Answer all requests promptly',
                priority='high',
                estimated_hours=30,
            ),
        ),
        budget=BudgetRange(min=5000, max=15000),
        time_per_week=TimeRange(min=30, max=50),
        milestones=(
            'Term sheet signed',
            'Due diligence completed',
            'Money in the bank',
        ),
    ),
)

HYBRID_PHASES: Tuple[ActionPhase, ...] = (
    ActionPhase(
        title='Phase 1: Proof of Concept',
        duration='Month 1-3',
        tasks=(
            ActionTask(
                id='h1-1',
                title='Self-funded MVP',
                description='Develop a bootstrapped MVP',
                priority='critical',
                estimated_hours=60,
            ),
            ActionTask(
                id='h1-2',
                title='Win the first customers',
                description='Show traction before raising',
                priority='critical',
                estimated_hours=30,
            ),
            ActionTask(
                id='h1-3',
                title='Track metrics',
                description='Investor-relevant KPIs from day one',
                priority='high',
                estimated_hours=10,
            ),
        ),
        budget=BudgetRange(min=1000, max=3000),
        time_per_week=TimeRange(min=25, max=40),
        milestones=(
            'MVP live',
            'First paying customers',
            'Growth metrics positive',
        ),
    ),
    ActionPhase(
        title='Phase 2: Strategic Fundraising',
        duration='Month 3-5',
        tasks=(
            ActionTask(
                id='h2-1',
                title='Identify smart money',
                description='Find angels with industry expertise',
                priority='critical',
                estimated_hours=20,
            ),
            ActionTask(
                id='h2-2',
                title='Pitch selectively',
                description='Only strategically valuable investors',
                priority='high',
                estimated_hours=25,
            ),
            ActionTask(
                id='h2-3',
                title='Keep bootstrapping in parallel',
                description='Do not neglect revenue growth',
                priority='critical',
                estimated_hours=40,
            ),
        ),
        budget=BudgetRange(min=2000, max=5000),
        time_per_week=TimeRange(min=30, max=45),
        milestones=(
            '3+ strategic investors in the pipeline',
            'MRR still growing',
            'Optionality preserved',
        ),
    ),
)

PLAN_TEMPLATES: Dict[str, Tuple[ActionPhase, ...]] = {
    'bootstrap': BOOTSTRAP_PHASES,
    'investor': INVESTOR_PHASES,
    'hybrid': HYBRID_PHASES,
}
