import discord
from discord.ext import commands

from .. import model as m


class BotError (Exception):
    pass


class ItemNotFoundError (BotError):
    def __init__(self, value=None):
        self.value = value


class Cog (commands.Cog):
    def __init__(self, bot):
        self.bot = bot


def sql_update(session, type, keys, values):
    '''
    Updates a sql object
    '''
    obj = session.query(type)\
        .filter_by(**keys).one_or_none()
    if obj is not None:
        for value in values:
            setattr(obj, value, values[value])
    else:
        values = values.copy()
        values.update(keys)
        obj = type(**values)
        session.add(obj)

    session.commit()

    return obj


def get_expression(session, userid, server, name):
    '''
    Gets a saved expression by name
    '''
    expression = session.query(m.Expression)\
        .filter_by(user=str(userid), server=str(server), name=name).one_or_none()
    if expression is None:
        raise ItemNotFoundError(name)
    return expression


async def send_pages(ctx, paginator):
    for page in paginator.pages:
        await ctx.send(page)


def item_paginator(items, header=None):
    paginator = commands.Paginator(prefix='', suffix='')
    if header:
        paginator.add_line(header)
    for item in items:
        paginator.add_line(str(item))
    return paginator


async def send_embed(ctx, *, content=None, author=None, description=None):
    '''
    Creates and sends an embed
    '''
    embed = discord.Embed()
    if description is not None:
        embed.description = description
    if author is not None:
        embed.color = author.color
        embed.set_author(name=author.display_name, icon_url=author.display_avatar.url)
    await ctx.send(content=content, embed=embed)


def strip_quotes(arg):
    '''
    Strips quotes from arguments
    '''
    if len(arg) >= 2 and arg.startswith('"') and arg.endswith('"'):
        arg = arg[1:-1]
    return arg
