import logging

from discord.ext import commands

from . import util
from .util import m
from ..parser import Parser, InvalidExpression, is_number, precedence

logger = logging.getLogger(__name__)


def format_number(value):
    '''
    Drops the fractional part of integral results
    '''
    if value.is_integer():
        return str(int(value))
    return str(value)


def substitute(expression, session, userid, server, output):
    '''
    Replaces the names of saved expressions with the expressions themselves
    Saved expressions may contain other saved expressions up to 3 levels deep
    '''
    saved = session.query(m.Expression)\
        .filter_by(user=str(userid), server=str(server))
    rep = {item.name: '( {} )'.format(item.expression) for item in saved}
    if not rep:
        return expression

    for _ in range(3):
        tokens = expression.split()
        if not any(token in rep for token in tokens):
            break
        expression = ' '.join(rep.get(token, token) for token in tokens)
        output.append('`{}`'.format(expression))
    return expression


def do_calc(expression, session, userid=None, server=None, output=None, evaluate=True):
    '''
    Does the saved expression replacement, then converts and evaluates
    Returns the Parser for the final expression
    '''
    if output is None:
        output = []
    expression = ' '.join(expression.split())
    output.append('`{}`'.format(expression))

    if server is not None:
        expression = substitute(expression, session, userid, server, output)

    parser = Parser(expression)
    output.append('postfix: `{}`'.format(parser.postfix))
    if evaluate:
        try:
            result = parser.eval()
        except IndexError:
            raise InvalidExpression('Not enough operands in {}'.format(parser.postfix)) from None
        logger.debug('%s = %s', parser.postfix, result)
        output.append('= {}'.format(format_number(result)))

    return parser


class CalcCategory (util.Cog):
    @commands.group('calc', aliases=['c'], invoke_without_command=True)
    async def group(self, ctx, *, expression: str):
        '''
        Evaluates an expression
        Note: If the name of a saved expression is included it will be replaced with the expression itself

        Parameters:
        [expression*] an infix expression, every number, operator and parenthesis separated by spaces
            The expression may include saved expressions, replacing the name with the expression itself
            Saved expressions may contain other saved expressions up to 3 levels deep

        Operations:

        ^ : exponentiation
        * : multiplication
        / : division
        + : addition
        - : subtraction

        Operators are not ordered by precedence, use parentheses to group them
        '''
        expression = util.strip_quotes(expression)
        server = ctx.guild.id if ctx.guild else None

        output = []
        do_calc(expression, ctx.session, ctx.author.id, server, output=output)
        await util.send_embed(ctx, author=ctx.author, description='\n'.join(output))

    @group.command()
    async def postfix(self, ctx, *, expression: str):
        '''
        Converts an expression to postfix notation without evaluating it

        Parameters:
        [expression*] an infix expression, as in the `calc` command
        '''
        expression = util.strip_quotes(expression)
        server = ctx.guild.id if ctx.guild else None

        output = []
        do_calc(expression, ctx.session, ctx.author.id, server, output=output, evaluate=False)
        await util.send_embed(ctx, author=ctx.author, description='\n'.join(output))

    @group.command(aliases=['set', 'update'], ignore_extra=False)
    @commands.guild_only()
    async def add(self, ctx, name: str, expression: str):
        '''
        Adds/updates a saved expression

        Parameters:
        [name] name of the expression to store
        [expression] the infix expression, wrapped in quotes
        '''
        if is_number(name) or name in precedence:
            raise commands.BadArgument('Invalid expression name: `{}`'.format(name))
        expression = ' '.join(expression.split())
        do_calc(expression, ctx.session, ctx.author.id, ctx.guild.id)

        item = util.sql_update(ctx.session, m.Expression, {
            'user': str(ctx.author.id),
            'server': str(ctx.guild.id),
            'name': name,
        }, {
            'expression': expression,
        })

        await util.send_embed(ctx, description='Saved {}'.format(str(item)))

    @group.command()
    @commands.guild_only()
    async def check(self, ctx, *, name: str):
        '''
        Shows a saved expression

        Parameters:
        [name*] the name of the expression
        '''
        name = util.strip_quotes(name)

        item = util.get_expression(ctx.session, ctx.author.id, ctx.guild.id, name)
        output = [str(item)]
        do_calc(item.expression, ctx.session, ctx.author.id, ctx.guild.id, output=output, evaluate=False)
        await util.send_embed(ctx, description='\n'.join(output))

    @group.command(ignore_extra=False)
    @commands.guild_only()
    async def list(self, ctx):
        '''
        Lists all of your saved expressions
        '''
        items = ctx.session.query(m.Expression)\
            .filter_by(user=str(ctx.author.id), server=str(ctx.guild.id))\
            .order_by(m.Expression.name)
        pages = util.item_paginator(items, header="{}'s expressions:".format(ctx.author.display_name))
        await util.send_pages(ctx, pages)

    @group.command(aliases=['delete'])
    @commands.guild_only()
    async def remove(self, ctx, *, name: str):
        '''
        Deletes a saved expression

        Parameters:
        [name*] the name of the expression
        '''
        name = util.strip_quotes(name)

        item = util.get_expression(ctx.session, ctx.author.id, ctx.guild.id, name)
        ctx.session.delete(item)
        ctx.session.commit()
        await util.send_embed(ctx, description='{} removed'.format(str(item)))


async def setup(bot):
    await bot.add_cog(CalcCategory(bot))
